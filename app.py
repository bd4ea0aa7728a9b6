import os

from attendance_sessions.main import create_app

app = create_app()

if __name__ == "__main__":
    # The reloader would fork a second process with its own sweeper.
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")), use_reloader=False)
