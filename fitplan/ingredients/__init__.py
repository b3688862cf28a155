# -*- coding: utf-8 -*-
"""Ingredient parsing, lookup and nutrition helpers (pure functions, no storage)."""
