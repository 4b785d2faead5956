"""WSGI entry point: ``flask --app deposit_calculator.wsgi run``."""

from deposit_calculator.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=5000, debug=True)
