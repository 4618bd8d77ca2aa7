"""Core type definitions."""

from typing import Literal

# Resolved placement of a generated item
Location = Literal["header", "footer", "both"]

Category = Literal["primary", "legal", "support", "company", "custom"]
