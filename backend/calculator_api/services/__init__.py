# Services package init
"""
Calculator API — Services Layer
=================================

Service Inventory:
    - calculator: the arithmetic engine (seven pure operations and the
      OPERATIONS catalogue the routes are built from)

Services know nothing about HTTP and can be tested without a client.
"""
