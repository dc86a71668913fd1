from qif_reader.cli import main

raise SystemExit(main())
