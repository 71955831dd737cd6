"""
Folio
=====

Run with:
    python app.py

Visit:
    http://localhost:5000              - Portfolio
    http://localhost:5000/admin        - Admin panel
    http://localhost:5000/admin/login  - Admin login
"""

from folio import create_app
from folio.core.config import Config

app = create_app()


if __name__ == '__main__':
    print("\n" + "=" * 60)
    print("Folio")
    print("=" * 60)
    print(f"Portfolio:       http://localhost:{Config.port}")
    print(f"Admin Panel:     http://localhost:{Config.port}/admin")
    print(f"Projects API:    http://localhost:{Config.port}/api/projects")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=Config.port, debug=Config.ENVIRONMENT != 'production')
