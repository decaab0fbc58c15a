from gomaker.cli import main

main()
