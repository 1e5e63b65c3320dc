"""Pydantic schemas for catalog items, rooms and preference profiles"""
