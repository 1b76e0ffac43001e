from uvplan.cli import main

raise SystemExit(main())
