from barrier_world.cli import main

if __name__ == "__main__":
    main()
