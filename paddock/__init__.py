"""
Championship participant scraper.

Fetches a championship page, extracts its participant table by anchoring on
each row's driver cell, and writes the participants to CSV.
"""
