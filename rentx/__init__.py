"""RentX rental-listing service."""
