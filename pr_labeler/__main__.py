# AGPL-3.0 License

from pr_labeler.cli import main

main()
