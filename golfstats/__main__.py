from golfstats.cli import main

raise SystemExit(main())
