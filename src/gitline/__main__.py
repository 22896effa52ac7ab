from gitline.cli import main

main()
