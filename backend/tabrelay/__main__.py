from tabrelay.main import run

run()
