from str_similarity.cli import main

raise SystemExit(main())
