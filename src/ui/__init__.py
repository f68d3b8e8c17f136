"""Terminal drawing surface and region borders."""
