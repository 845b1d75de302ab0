from campusnet.database import Base, engine
import campusnet.models  # registers every model on Base.metadata


def main():
    Base.metadata.create_all(bind=engine)
    print("Tables created successfully")


if __name__ == "__main__":
    main()
