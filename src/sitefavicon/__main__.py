from sitefavicon.cli import main

main()
