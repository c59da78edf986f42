# -*- coding: utf-8 -*-
from .main import cli

__all__ = ["cli"]
