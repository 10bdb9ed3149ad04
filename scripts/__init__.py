"""
Deployment scripts
Run from the repository root: python -m scripts.<name>
"""
