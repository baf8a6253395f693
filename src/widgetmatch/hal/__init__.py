"""Hardware/toolkit abstraction layer for widget trees."""
