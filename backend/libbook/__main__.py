from libbook.main import run

run()
