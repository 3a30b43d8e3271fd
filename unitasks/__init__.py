"""University task and course tracker."""
