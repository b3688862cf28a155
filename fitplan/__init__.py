# -*- coding: utf-8 -*-
"""Fitplan backend: workout/diet plans, meal customization, shopping lists."""
