"""Settings, logging, storage and security helpers shared by the app."""
