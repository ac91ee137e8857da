"""Inclusion tree representation built from dotted resource paths.

This module provides the splitter, node types, and tree builder that turn an include
parameter into a nested, order-preserving inclusion tree.
"""
