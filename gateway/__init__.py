# -*- coding: utf-8 -*-
"""Backend gateway that keeps third-party API keys out of the front-end."""
