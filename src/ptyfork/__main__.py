from ptyfork.cli import main

raise SystemExit(main())
