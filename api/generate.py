# Serverless entrypoint (Vercel Python runtime).
# The runtime imports this module and looks for a WSGI callable named "app";
# this file is served at /api/generate.

from flashgen.app_factory import create_app

app = create_app()

if __name__ == "__main__":
    # Optional: run locally for testing this entrypoint
    # python api/generate.py
    from werkzeug.serving import run_simple
    run_simple("0.0.0.0", 5000, app)
