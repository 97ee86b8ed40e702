from number_handler.cli import main

raise SystemExit(main())
