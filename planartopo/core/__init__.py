# -*- coding: utf-8 -*-
"""The core package holds the geometry model of planartopo.

It defines the value types (envelopes, intersection matrices, precision models), the abstract Geometry with its
predicate and overlay dispatch, the concrete variants and the factory that builds them.
"""
