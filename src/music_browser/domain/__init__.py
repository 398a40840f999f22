"""Domain layer - library listing, navigation and playback."""
