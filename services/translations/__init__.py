# -*- coding: utf-8 -*-
"""Message catalogs loaded by the TranslationManager."""
