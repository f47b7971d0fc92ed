import sys

from quote_seeder.seed_quotes import main

sys.exit(main())
