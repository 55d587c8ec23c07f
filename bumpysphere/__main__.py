from .animate import main

raise SystemExit(main())
