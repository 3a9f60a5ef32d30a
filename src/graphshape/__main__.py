from graphshape.cli import main

raise SystemExit(main())
