# -*- coding: utf-8 -*-
"""Chat-completion forwarding (OpenAI)."""
