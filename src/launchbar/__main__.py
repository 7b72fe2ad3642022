from launchbar.main import run

run()
