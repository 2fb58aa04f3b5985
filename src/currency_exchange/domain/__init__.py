"""Domain objects of the currency exchange library."""
