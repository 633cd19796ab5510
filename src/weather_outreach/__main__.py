from weather_outreach.cli import app

app()
