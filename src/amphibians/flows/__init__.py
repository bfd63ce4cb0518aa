"""
Prefect flows.

Flows:
- build: fetch the amphibian list once and write a static site/index.html

Usage (local):
    python -m amphibians.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-site/default'
"""
