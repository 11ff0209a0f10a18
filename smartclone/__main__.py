from smartclone.cli import main

main()
