# -*- coding: utf-8 -*-
"""
UI-free wizard orchestration: step catalog, sequencing, messages, validation.
"""
