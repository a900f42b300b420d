"""Run the dashboard API: ``python app.py`` (APP_ENV selects the settings)."""

from src.daycare_dashboard.daycare_dashboard.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
