"""
Version 1 of the API.

This subpackage bundles all endpoints of the current public contract
of the Fleet Management API.  Breaking changes should be introduced in
new version subpackages (e.g. ``v2``) to preserve backwards
compatibility.
"""
