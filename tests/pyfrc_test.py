"""
This test module imports tests that come with pyfrc, and can be used
to test basic functionality of just about any robot.
"""

from pyfrc.tests import *
