"""
Desktop entry point
 - Launches the starter selection window via desktop_ui.app.main()
 - Configuration and startup failures are reported there
"""
import sys
from desktop_ui.app import main

if __name__ == "__main__":
    sys.exit(main())
