# -*- coding: utf-8 -*-
"""The ops package contains the algorithms the geometry core delegates to.

It declares the services interface, provides its shapely-backed implementation, and implements the rectangle
predicates and the centroid calculators natively.
"""
