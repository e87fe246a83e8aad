from jank.main import main

raise SystemExit(main())
