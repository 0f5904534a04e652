from image_wizard.cli import main

raise SystemExit(main())
