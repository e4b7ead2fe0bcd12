import os
import sys

from intern_tracker.app import create_app


if __name__ == "__main__":
    # Config path from argv, then env, then ./config.json
    config_path = sys.argv[1] if len(sys.argv) > 1 else os.getenv("INTERN_TRACKER_CONFIG", "config.json")

    context = create_app(config_path)
    view = context.model.get_filtered_internship_list()

    if len(view) == 0:
        print("No internships yet.")
    else:
        print(view.to_frame().to_string(index=False))
