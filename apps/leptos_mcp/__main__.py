from apps.leptos_mcp.cli import main

raise SystemExit(main())
