from themeflip.cli import main

main()
