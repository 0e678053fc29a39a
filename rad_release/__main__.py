from rad_release.cli.app import main

main()
