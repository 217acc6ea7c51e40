from piranhito.cli import main

main()
