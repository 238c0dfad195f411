from projtabs.dashboard import main

main()
