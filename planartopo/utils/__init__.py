# -*- coding: utf-8 -*-
"""Utility helpers for building sample geometries."""
