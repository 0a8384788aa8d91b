"""
Portfolio Admin
===============

Run with:
    python app.py

Visit:
    http://localhost:5000/admin          - Admin dashboard
    http://localhost:5000/api/portfolio  - Public portfolio feed
"""

from flask import Flask, redirect, url_for
from portfolio_admin import PortfolioAdmin
from portfolio_admin.core.config import Config

app = Flask(__name__)

# Registers the dashboard, editors and public feed
portfolio_admin = PortfolioAdmin(app)


@app.route('/')
def index():
    return redirect(url_for('admin.dashboard'))


if __name__ == '__main__':
    print("\n" + "=" * 60)
    print("Portfolio Admin")
    print("=" * 60)
    print(f"Admin Panel:     http://localhost:{Config.port}/admin")
    print(f"Public Feed:     http://localhost:{Config.port}/api/portfolio")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=Config.port, debug=True)
