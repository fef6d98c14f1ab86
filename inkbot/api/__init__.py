"""HTTP surface: webhook processing and the Starlette app."""
