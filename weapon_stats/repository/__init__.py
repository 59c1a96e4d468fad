"""Repository layer: DB access helpers (SQLite).

Keep functions thin and read-only, so services avoid SQL strings.
"""
from __future__ import annotations
