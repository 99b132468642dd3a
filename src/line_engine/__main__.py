from line_engine.cli import main

raise SystemExit(main())
