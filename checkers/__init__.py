"""Forced-capture checkers rules engine with an alpha-beta computer opponent."""
