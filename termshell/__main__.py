from termshell.main import run

run()
