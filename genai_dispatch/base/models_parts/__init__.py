"""Single-class model modules re-exported by :mod:`genai_dispatch.base.models`."""
