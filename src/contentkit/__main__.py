from contentkit.cli import main

raise SystemExit(main())
