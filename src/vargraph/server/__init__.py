"""vargraph.server - REST API server for variant editing.

Requires the ``server`` extra (flask, flask-cors).
"""
