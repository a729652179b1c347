from kilo_engine.app import main

raise SystemExit(main())
