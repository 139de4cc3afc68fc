from tabedit.cli import main

raise SystemExit(main())
