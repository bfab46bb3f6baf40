"""Configuration dictionaries for the asteroids simulation"""
