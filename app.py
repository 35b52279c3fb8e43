"""
Development entry point.

Production runs the factory through a WSGI server, e.g.
``gunicorn "docupper:create_app('production')"``.
"""
from docupper import create_app

app = create_app()

if __name__ == '__main__':
    print(f"Server running on http://localhost:{app.config['PORT']}")
    app.run(host="0.0.0.0", port=app.config['PORT'])
