# Routes package init
"""
Tuiter Backend — Operational Routes
====================================

Routes that belong to no resource:
    - health.py:  GET /health
    - hello.py:   GET /hello, GET /add/{a}/{b}

Resource routes live on the controllers (tuiter.controllers).
"""
