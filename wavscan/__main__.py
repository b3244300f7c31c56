from wavscan.cli import main

raise SystemExit(main())
