"""ccv commands."""
