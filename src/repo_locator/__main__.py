from repo_locator.cli.main import main


raise SystemExit(main())
