# -*- coding: utf-8 -*-
"""Energy and macro targets derived from a user's body metrics and goals."""
