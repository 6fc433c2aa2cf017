"""
Prefect flows for the dashboard.

Flows:
- snapshot: fetch every dashboard view (observations, species, routes,
  stations, station details) through the shared cache

Usage (local):
    python -m eco_dashboard.flows.snapshot

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'dashboard-snapshot/default'
"""
