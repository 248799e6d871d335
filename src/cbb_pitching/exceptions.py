class CbbException(Exception):
    """Base class for errors raised by the pitcher tracker."""
