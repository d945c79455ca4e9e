"""
API package containing versioned routes.

Each version subpackage (currently ``v1``) exposes a top‑level
``router`` that includes the entity, analytics and info routers.  The
application mounts it at the root and under the configured API prefix.
"""
