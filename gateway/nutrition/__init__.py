# -*- coding: utf-8 -*-
"""Nutrition data forwarding (Nutritionix natural-language search and barcode lookup)."""
