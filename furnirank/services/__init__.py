"""Scorers, rankers and the catalog store"""
