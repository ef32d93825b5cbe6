"""Global pytest configuration."""

import os

# Set before any backend imports read settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RESEND_API_KEY", "")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
