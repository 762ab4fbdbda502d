"""Core building blocks shared by every domain."""
