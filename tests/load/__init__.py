"""
Load testing module for sensor-loadtest.

This package contains the Locust binding that drives the ingestion API with
generated records and validates every response.

Usage:
    locust -f tests/load/locustfile.py --host=http://localhost:8080
"""
