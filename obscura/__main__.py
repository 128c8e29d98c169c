from obscura.cli import main

raise SystemExit(main())
