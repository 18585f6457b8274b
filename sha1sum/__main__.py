from sha1sum.cli import main

raise SystemExit(main())
