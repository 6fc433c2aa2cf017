"""
Domain services and shared utilities.

Each service answers dashboard queries through the view cache, falling back
to synthetic data when its source fails. No HTTP routing here.

- http.py  - Shared requests session + fetch_text (raises RemoteUnavailable)
- birds.py - Bird observations, species lists, migration routes (eBird)
- water.py - Station list and station detail (wateroffice)
"""
