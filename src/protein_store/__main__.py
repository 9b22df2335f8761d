from .presentation.cli.visualize_protein import main

if __name__ == "__main__":
    raise SystemExit(main())
