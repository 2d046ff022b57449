import unittest

import baseuri


class TestVersion(unittest.TestCase):
    def test_version(self):
        version = baseuri.__version__
        print(version)
        self.assertTrue(version.startswith("0"))
